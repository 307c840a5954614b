"""
Scheduled, log-only reports. Nothing here is reachable over HTTP.
"""
