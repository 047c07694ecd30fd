"""Users app package.

Defines the custom user model (email login, display name and avatar
URL) and the identity helpers the other apps use to resolve the caller.
Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout
the project.
"""
