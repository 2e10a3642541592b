from .renderer import ChartRenderer, plan_summary

__all__ = ["ChartRenderer", "plan_summary"]
