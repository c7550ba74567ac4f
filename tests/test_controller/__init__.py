"""Dispatcher and selection strategy tests"""
