# app/db/models/__init__.py
from .user import User
from .org import Org, OrgMember
from .discussion_thread import DiscussionThread
from .label import Label
from .thread_label import ThreadLabel
