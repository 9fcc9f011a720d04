"""FaceGuard AI — skincare recommendation engine and its HTTP surface."""

__version__ = "1.0.0"
