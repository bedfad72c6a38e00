"""
Academy Analytics Engine

Derived metrics for a sports academy: attendance, engagement streaks,
match exposure, training load, pathway pipeline and coach action queues.
"""

__version__ = "0.1.0"
__author__ = "Academy Analytics Team"
