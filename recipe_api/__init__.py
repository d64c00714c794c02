"""Recipe management API: ingredients, recipes and a seed/reset utility."""
