"""
Resource wrappers. Each module exposes module level create/get functions and a
wrapper class carrying update, delete and refresh.
"""
