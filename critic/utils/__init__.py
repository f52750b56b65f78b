"""
Utility modules for Restaurant Critic.

Cross-cutting concerns:
- Storage: File I/O helpers for review exports
"""
