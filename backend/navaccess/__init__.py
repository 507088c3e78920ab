"""
Xport navigation access control - role and route driven sidebar filtering
"""
