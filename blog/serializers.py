from rest_framework import serializers
from blog.models import Comment, Post, User


class AuthorSerializer(serializers.ModelSerializer):
    """Public author/commenter fields: id, display name and email."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]


class CommenterSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["name", "email"]


class PostSerializer(serializers.ModelSerializer):
    """Post with author info; counts are present when the queryset annotates them."""
    authorId = serializers.IntegerField(source="author_id", read_only=True)
    author = AuthorSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    likeCount = serializers.SerializerMethodField()
    commentCount = serializers.SerializerMethodField()
    url = serializers.CharField(source="share_url", read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "title",
            "content",
            "authorId",
            "author",
            "createdAt",
            "updatedAt",
            "likeCount",
            "commentCount",
            "url",
        ]
        read_only_fields = fields

    def get_likeCount(self, obj):
        count = getattr(obj, "like_count", None)
        return obj.likes.count() if count is None else count

    def get_commentCount(self, obj):
        count = getattr(obj, "comment_count", None)
        return obj.comments.count() if count is None else count


class CommentSerializer(serializers.ModelSerializer):
    """Comment with the commenter's name/email."""
    postId = serializers.UUIDField(source="post_id", read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    user = CommenterSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "content", "postId", "userId", "user", "createdAt"]
        read_only_fields = fields
