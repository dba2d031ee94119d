"""Test support: stub application and Playwright fakes."""
