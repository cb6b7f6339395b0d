"""Minhas Finanças package.

Organized by feature modules (users, entries) with a thin Flask controller
layer on top of service/repository layers.
"""
