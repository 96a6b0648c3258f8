# app/adapters/outbound/persistence/seeds/default_data.py

"""
Default groups, permissions and grant matrix loaded into a fresh database.
"""

# Groups
GROUPS = [
    {"id": 1, "name": "Admin", "description": "System administrators with full access"},
    {"id": 2, "name": "Level 1", "description": "Basic access level users"},
    {"id": 3, "name": "Level 2", "description": "Intermediate access level users"},
    {"id": 4, "name": "Manager", "description": "Team managers with elevated privileges"},
]

# Permissions
PERMISSIONS = [
    {"id": 1, "name": "Create", "description": "Can create new records"},
    {"id": 2, "name": "Read", "description": "Can view records"},
    {"id": 3, "name": "Update", "description": "Can modify existing records"},
    {"id": 4, "name": "Delete", "description": "Can delete records"},
    {"id": 5, "name": "ManageUsers", "description": "Can manage user accounts"},
    {"id": 6, "name": "ManageGroups", "description": "Can manage groups"},
    {"id": 7, "name": "ViewReports", "description": "Can view reports"},
    {"id": 8, "name": "ManageSystem", "description": "Can manage system settings"},
]

# Permission ids granted to each group id
GROUP_PERMISSIONS = {
    1: [1, 2, 3, 4, 5, 6, 7, 8],
    2: [2],
    3: [1, 2, 3],
    4: [1, 2, 3, 4, 7],
}
