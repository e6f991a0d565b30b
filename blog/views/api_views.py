from collections.abc import Mapping

from django.contrib.auth import login, logout
from django.middleware.csrf import get_token
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from blog.authentication import BlogSessionAuthentication, resolve_auth_context
from blog.serializers import AuthorSerializer, CommentSerializer, PostSerializer
from blog.services import AccountService, CommentService, LikeService, PostService

post_service = PostService()
like_service = LikeService()
comment_service = CommentService()
account_service = AccountService()


def _payload(request):
    """Request body as a mapping; anything else counts as an empty body."""
    data = request.data
    return data if isinstance(data, Mapping) else {}


class PostListApi(APIView):
    """List all posts, or create one as the logged-in user."""

    def get(self, request):
        posts = post_service.list()
        return Response({"posts": PostSerializer(posts, many=True).data})

    def post(self, request):
        data = _payload(request)
        post = post_service.create(
            title=data.get("title"),
            content=data.get("content"),
            caller=resolve_auth_context(request),
        )
        return Response({"post": PostSerializer(post).data}, status=status.HTTP_201_CREATED)


class PostDetailApi(APIView):
    """Read, update or delete a post; changes need the author or the server key."""

    def get(self, request, post_id):
        post = post_service.get(post_id)
        return Response({"post": PostSerializer(post).data})

    def put(self, request, post_id):
        data = _payload(request)
        post = post_service.update(
            post_id,
            title=data.get("title"),
            content=data.get("content"),
            caller=resolve_auth_context(request),
        )
        return Response({"post": PostSerializer(post).data})

    patch = put

    def delete(self, request, post_id):
        post_service.delete(post_id, caller=resolve_auth_context(request))
        return Response({"success": True})


class PostAtPositionApi(APIView):
    """Fetch the Nth newest post (1-based)."""

    def get(self, request, position):
        post = post_service.get_at_position(position)
        return Response({"post": PostSerializer(post).data})


class PostLikeApi(APIView):
    """Like count/status for a post, and the like toggle."""

    def get(self, request, post_id):
        result = like_service.status(post_id, resolve_auth_context(request))
        return Response(
            {
                "likeCount": result.like_count,
                "isLikedByCurrentUser": result.is_liked_by_current_user,
            }
        )

    def post(self, request, post_id):
        result = like_service.toggle(post_id, resolve_auth_context(request))
        return Response(
            {
                "liked": result.liked,
                "message": result.message,
                "likeCount": result.like_count,
            }
        )


class PostCommentsApi(APIView):
    """List comments on a post, or add one as the logged-in user."""

    def get(self, request, post_id):
        comments = comment_service.list(post_id)
        return Response({"comments": CommentSerializer(comments, many=True).data})

    def post(self, request, post_id):
        comment = comment_service.create(
            post_id,
            content=_payload(request).get("content"),
            caller=resolve_auth_context(request),
        )
        return Response({"comment": CommentSerializer(comment).data}, status=status.HTTP_201_CREATED)


class RegisterApi(APIView):
    """Create an account from name, email and password."""
    authentication_classes = []

    def post(self, request):
        data = _payload(request)
        user = account_service.register(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
        )
        return Response(
            {"user": AuthorSerializer(user).data, "message": "User registered successfully"},
            status=status.HTTP_201_CREATED,
        )


class LogInApi(APIView):
    """Start a session for email/password credentials."""
    authentication_classes = []

    def get_authenticate_header(self, request):
        # Keeps bad credentials a 401; DRF downgrades to 403 without a header.
        return BlogSessionAuthentication().authenticate_header(request)

    def post(self, request):
        data = _payload(request)
        user = account_service.check_credentials(
            request, email=data.get("email"), password=data.get("password")
        )
        login(request, user)
        return Response({"user": AuthorSerializer(user).data, "csrfToken": get_token(request)})


class LogOutApi(APIView):
    """End the current session, if any."""

    def post(self, request):
        logout(request)
        return Response({"success": True})
