"""Tests for the core distance transform and blending stages."""
