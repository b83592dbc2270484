"""
Audio Backends Package

Contains the per-platform implementations behind the manager API.
"""
