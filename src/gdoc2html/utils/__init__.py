"""Utility helpers for gdoc2html: HTML escaping, URL proxying, units, sections, dependency checks."""
