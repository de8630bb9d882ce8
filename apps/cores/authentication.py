from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, AuthenticationFailed


class IgniteJWTAuthentication(JWTAuthentication):
    """
    Resolves the bearer token into ``request.user`` once per request.

    The role claim embedded at login must match the stored account.
    """

    def get_user(self, validated_token):
        user = super().get_user(validated_token)

        token_role = validated_token.get("role")
        if token_role is not None and token_role != user.role:
            raise InvalidToken("Token role does not match account.")

        return user


class OptionalJWTAuthentication(IgniteJWTAuthentication):
    """
    Same as IgniteJWTAuthentication, but a bad or expired token is treated
    as an anonymous request instead of a 401.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except (InvalidToken, AuthenticationFailed):
            return None
