"""
End-to-end tests for cliproc.

These tests drive complete workflows: building a processor from a full argv,
registering commands, and checking what the user sees and the exit code.
"""
