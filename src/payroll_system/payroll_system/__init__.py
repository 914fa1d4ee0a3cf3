"""Payroll System package.

This package is organized by feature modules (employees, payroll, console)
with a thin console controller layer over service/repository layers.
"""
