"""Routing — the application's named route table and its URL context.

Routes are registered in order during setup; that order is the order
clients receive them in.
"""
