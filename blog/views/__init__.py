from .post_views import *
from .log_in_view import *
from .log_out_view import *
from .sign_up_view import *
from .api_views import *
