"""Advisor Desk — client relationship management for financial advisors."""
