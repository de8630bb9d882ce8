from rest_framework_simplejwt.tokens import RefreshToken


def issue_tokens(user):
    """
    Signed, time-boxed credentials for ``user``. Identity and role travel
    in the token; the access token carries every custom claim of the refresh.
    """
    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role
    refresh["email"] = user.email

    return {
        "token": str(refresh.access_token),
        "refresh": str(refresh),
    }
