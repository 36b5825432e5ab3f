"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and token flows
- users/: User directory and statistics
- projects/: Project lifecycle and membership
- tasks/: Task lifecycle and assignment

Import from subdirectories.
"""
