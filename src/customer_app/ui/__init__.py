"""Toolkit-independent UI state"""
from .refresh import PullToRefreshGesture

__all__ = ["PullToRefreshGesture"]
