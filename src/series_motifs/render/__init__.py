from .plot import plot_timeseries

__all__ = ["plot_timeseries"]
