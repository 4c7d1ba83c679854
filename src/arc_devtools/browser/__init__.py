"""browser package. Arc acquisition with target filtering, launch planning, and lifecycle.

Built on Playwright's async API over the Chrome DevTools Protocol.
"""
from .chrome import (  # noqa: F401
    DEFAULT_EXECUTABLE_PATHS,
    build_launch_args,
    default_user_data_dir,
    profile_dir_name,
    resolve_executable_path,
)
from .handle import BrowserHandle  # noqa: F401
from .session import BrowserManager, launch_browser  # noqa: F401
from .targets import NEW_TAB_URL, filter_pages, make_target_filter  # noqa: F401
from .window import resize_content  # noqa: F401
