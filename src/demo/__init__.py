"""
Demo runner — демонстрация iteration primitives.
"""

from src.demo.runner import DemoConfig, DemoReport, main, run_demo

__all__ = [
    "DemoConfig",
    "DemoReport",
    "run_demo",
    "main",
]
