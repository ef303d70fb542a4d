"""Base controller classes."""

from kubetop.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
