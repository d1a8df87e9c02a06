from gaussflow.visualize.orbitals import frontier_levels, plot_frontier_orbitals

__all__ = ["frontier_levels", "plot_frontier_orbitals"]
