"""
URL configuration for the inkwell project.

Pages are server-rendered Django views; everything under `api/` is the
JSON API used by browser widgets and the assistant action catalog.
"""
from django.contrib import admin
from django.urls import path
from blog import views
from blog.views.api_views import (
    LogInApi,
    LogOutApi,
    PostAtPositionApi,
    PostCommentsApi,
    PostDetailApi,
    PostLikeApi,
    PostListApi,
    RegisterApi,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', views.home, name='home'),
    path('log-in/', views.LogInView.as_view(), name='log_in'),
    path('log-out/', views.log_out, name='log_out'),
    path('sign-up/', views.SignUpView.as_view(), name='sign_up'),
    path('create/', views.post_create, name='post_create'),
    path('my-posts/', views.my_posts, name='my_posts'),
    path('posts/<uuid:post_id>/', views.post_detail, name='post_detail'),
    path('posts/<uuid:post_id>/edit/', views.post_edit, name='post_edit'),
    path('posts/<uuid:post_id>/delete/', views.post_delete, name='post_delete'),
    path('posts/<uuid:post_id>/like/', views.toggle_like, name='toggle_like'),
    path('posts/<uuid:post_id>/comment/', views.add_comment, name='add_comment'),

    path('api/posts/', PostListApi.as_view(), name='post_list_api'),
    path('api/posts/at/<int:position>/', PostAtPositionApi.as_view(), name='post_at_position_api'),
    path('api/posts/<uuid:post_id>/', PostDetailApi.as_view(), name='post_detail_api'),
    path('api/posts/<uuid:post_id>/like/', PostLikeApi.as_view(), name='post_like_api'),
    path('api/posts/<uuid:post_id>/comments/', PostCommentsApi.as_view(), name='post_comments_api'),
    path('api/auth/register/', RegisterApi.as_view(), name='register_api'),
    path('api/auth/login/', LogInApi.as_view(), name='log_in_api'),
    path('api/auth/logout/', LogOutApi.as_view(), name='log_out_api'),
]
