from .comment_form import CommentForm
from .log_in_form import LogInForm
from .post_form import PostForm
from .user_forms import SignUpForm

__all__ = ["CommentForm", "LogInForm", "PostForm", "SignUpForm"]
