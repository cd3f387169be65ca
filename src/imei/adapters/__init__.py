"""Adapters that plug :class:`imei.Imei` into third-party frameworks.

Adapters call into the domain layer and nothing else; the domain never
imports from here.
"""
