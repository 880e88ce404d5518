"""Compile tasks: turn repository health files into site collection documents."""
