"""
Trip Planner backend: chat proxy and recommendation parsing for the
tourism site's "Plan my trip" form.
"""
