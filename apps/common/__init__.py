"""
Shared building blocks for the service layers.

- outcomes: Success/Failure values returned by workflow steps
- storage: transactional storage scopes handed to the workflows
"""
