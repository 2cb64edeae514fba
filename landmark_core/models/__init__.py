"""Data models shared by the schedule, rating and route services."""
