"""Swap images in a LaTeX project for a placeholder to speed up builds."""
