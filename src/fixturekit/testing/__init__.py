"""Test runner integration."""
