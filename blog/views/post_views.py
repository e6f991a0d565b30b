from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST
from rest_framework.exceptions import APIException, NotFound

from blog.authentication import resolve_auth_context
from blog.exceptions import error_message
from blog.forms import CommentForm, PostForm
from blog.services import CommentService, LikeService, PostService
from blog.utils.http import is_ajax

post_service = PostService()
like_service = LikeService()
comment_service = CommentService()


def _get_post_or_404(post_id):
    try:
        return post_service.get(post_id)
    except NotFound:
        raise Http404("Post not found.")


def _back_to_post(request, post_id):
    return redirect(request.META.get("HTTP_REFERER") or reverse("post_detail", kwargs={"post_id": post_id}))


def home(request):
    """List every post, newest first, with like and comment counts."""
    return render(request, "blog/home.html", {"posts": post_service.list()})


def post_detail(request, post_id):
    """Show one post with its comments and the viewer's like state."""
    post = _get_post_or_404(post_id)
    caller = resolve_auth_context(request)
    like_status = like_service.status(post.id, caller)
    return render(
        request,
        "blog/post_detail.html",
        {
            "post": post,
            "comments": comment_service.list(post.id),
            "comment_form": CommentForm(),
            "like_count": like_status.like_count,
            "user_liked": like_status.is_liked_by_current_user,
            "is_author": caller.user_id == post.author_id,
            "share_url": post.share_url,
        },
    )


@login_required
def post_create(request):
    """Create a new post from a submitted PostForm."""
    form = PostForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        try:
            post = post_service.create(
                title=form.cleaned_data["title"],
                content=form.cleaned_data["content"],
                caller=resolve_auth_context(request),
            )
        except APIException as e:
            form.add_error(None, error_message(e.detail))
        else:
            messages.success(request, "Post published.")
            return redirect("post_detail", post_id=post.id)

    response = render(request, "blog/post_form.html", {"form": form, "post": None})
    response["Cache-Control"] = "no-store, must-revalidate"
    return response


@login_required
def post_edit(request, post_id):
    """Edit a post owned by the current user; other users get a 404."""
    post = _get_post_or_404(post_id)
    if post.author_id != request.user.pk:
        raise Http404("Post not found.")

    form = PostForm(request.POST or None, instance=post)
    if request.method == "POST" and form.is_valid():
        try:
            post_service.update(
                post_id,
                title=form.cleaned_data["title"],
                content=form.cleaned_data["content"],
                caller=resolve_auth_context(request),
            )
        except APIException as e:
            form.add_error(None, error_message(e.detail))
        else:
            messages.success(request, "Post updated.")
            return redirect("post_detail", post_id=post_id)

    return render(request, "blog/post_form.html", {"form": form, "post": post})


@login_required
def post_delete(request, post_id):
    """Delete a post owned by the current user (POST only)."""
    if request.method != "POST":
        return redirect("post_detail", post_id=post_id)
    try:
        post_service.delete(post_id, caller=resolve_auth_context(request))
    except APIException as e:
        messages.error(request, error_message(e.detail))
        return redirect("post_detail", post_id=post_id)
    messages.success(request, "Post deleted.")
    return redirect("my_posts")


@login_required
def my_posts(request):
    """List the current user's posts with counts."""
    posts = post_service.list_for_author(request.user.pk)
    return render(request, "blog/my_posts.html", {"posts": posts})


@login_required
@require_POST
def toggle_like(request, post_id):
    """Form/fetch fallback for the like button."""
    try:
        result = like_service.toggle(post_id, resolve_auth_context(request))
    except NotFound:
        raise Http404("Post not found.")

    if is_ajax(request):
        return JsonResponse(
            {"liked": result.liked, "message": result.message, "likeCount": result.like_count}
        )
    return _back_to_post(request, post_id)


@login_required
@require_POST
def add_comment(request, post_id):
    """Create a new comment on a post for the current user."""
    form = CommentForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Comment content is required.")
        return redirect("post_detail", post_id=post_id)
    try:
        comment_service.create(
            post_id,
            content=form.cleaned_data["content"],
            caller=resolve_auth_context(request),
        )
    except NotFound:
        raise Http404("Post not found.")
    except APIException as e:
        messages.error(request, error_message(e.detail))
    else:
        messages.success(request, "Comment posted.")
    return redirect("post_detail", post_id=post_id)
