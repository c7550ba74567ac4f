"""Cabin state, request ledger, mover and load sensor tests"""
