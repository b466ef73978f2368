"""Applicant tracking API with a per-position Kanban board."""
