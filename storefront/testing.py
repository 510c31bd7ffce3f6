from django.contrib.auth.models import Group, User


def user_with_roles(username, *roles):
    """Creates an auth user whose groups carry the given roles (USER, ADMIN)."""
    user = User.objects.create_user(username=username, password="unused-password")
    for role in roles:
        group, _ = Group.objects.get_or_create(name=role)
        user.groups.add(group)
    return user
