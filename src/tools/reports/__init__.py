"""Offline reports over solve journals."""
