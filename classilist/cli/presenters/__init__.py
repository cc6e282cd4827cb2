from .progress import ProgressPresenter
from .roles import RolesPresenter
from .summary import SummaryPresenter

__all__ = ["ProgressPresenter", "RolesPresenter", "SummaryPresenter"]
