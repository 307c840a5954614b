"""
Tasks: actionable steps under a goal.
"""
