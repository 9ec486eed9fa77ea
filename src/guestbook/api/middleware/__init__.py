"""API middleware package.

Cross-cutting concerns (error mapping, request ids, timing) belong in
middleware so routers stay focused on calling the repository.
"""
