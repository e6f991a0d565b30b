from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from blog.models import Comment, Like, Post, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for the email-keyed user model."""
    ordering = ('email',)
    list_display = ('email', 'name', 'is_staff', 'date_joined')
    search_fields = ('email', 'name')
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('name',)}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('email', 'name', 'password1', 'password2')}),
    )


class CommentInline(admin.TabularInline):
    """Show comments directly on the post page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['user', 'content', 'created_at']


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin configuration for posts with engagement counts."""
    list_display = ('title', 'author', 'created_at', 'like_count_display', 'comment_count_display')
    list_filter = ('created_at',)
    search_fields = ('title', 'content', 'author__email', 'author__name')
    inlines = [CommentInline]

    def like_count_display(self, obj):
        """Return number of likes on the post."""
        return obj.likes.count()
    like_count_display.short_description = "Likes"

    def comment_count_display(self, obj):
        """Return number of comments on the post."""
        return obj.comments.count()
    comment_count_display.short_description = "Comments"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin configuration for comments."""
    list_display = ('short_content', 'user', 'post', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__email')

    def short_content(self, obj):
        """Shorten comment text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    """Read-mostly view of likes."""
    list_display = ('user', 'post', 'created_at')
    search_fields = ('user__email', 'post__title')
