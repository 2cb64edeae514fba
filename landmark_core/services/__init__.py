"""Landmark services: schedules, ratings, routes and their collaborators."""
