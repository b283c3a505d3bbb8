from isorelief.io.grid_csv import GridLoadError, load_grid_csv, write_grid_csv

__all__ = ["GridLoadError", "load_grid_csv", "write_grid_csv"]
