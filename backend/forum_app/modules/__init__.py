"""
Business services grouped by feature.
"""
