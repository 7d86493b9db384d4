"""
feedback_collector.api.routers

Route modules for the admin surface, respondent forms and health probes.
"""
