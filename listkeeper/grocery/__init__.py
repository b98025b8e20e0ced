"""Grocery List Manager: priced grocery types and shopping lists."""
