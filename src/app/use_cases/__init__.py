"""
Use Cases

Organized into domain folders:
- auth/: Session lifecycle and authentication gates
- sessions/: Session enumeration and termination
- users/: User directory and profile
- blogs/: Blogs, likes and saved blogs
"""
