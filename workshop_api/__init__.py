"""Greeting and age calculation HTTP service."""
