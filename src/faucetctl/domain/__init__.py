"""Domain layer — amount conversion and resolution rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
Nothing in this layer logs; failures are raised to the caller.
"""
