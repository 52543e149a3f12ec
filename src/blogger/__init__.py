"""Blogger - authentication backend for the blog application."""
