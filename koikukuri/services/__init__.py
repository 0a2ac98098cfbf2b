"""
Use cases for the site backend.

Service modules orchestrate the repositories and the upload binder. Routers
call these services instead of touching the JSON documents or upload files.
"""
