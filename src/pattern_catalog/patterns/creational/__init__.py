"""Creational pattern examples."""

from .builder import BuilderState, BurgerBuilder, Hamburger, HamburgerBuilder

__all__ = ["BuilderState", "BurgerBuilder", "Hamburger", "HamburgerBuilder"]
