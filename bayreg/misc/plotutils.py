## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure with helpers for the
    objects produced by the regression models: observations, credible
    bands, sample paths and density contours.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        else:
            self.ax.set_xlim(new_limits)
            return new_limits

    def plotband(
        self,
        x,
        band,
        mean_color="#F2404C",
        fill_color="#BFBFBF",
        mean_label="posterior mean",
        band_label="credible band",
        alpha=0.8,
    ):
        """Credible band and its mean.

        Parameters
        ----------
        x : array_like, shape (m,)
        band : CredibleBand
            (lower, upper, mean) as returned by `get_credible_band`.
        """
        x = np.asarray(x).flatten()
        lower = np.asarray(band.lower).flatten()
        upper = np.asarray(band.upper).flatten()

        self.ax.fill(
            np.hstack((x, x[::-1])),
            np.hstack((upper, lower[::-1])),
            color=fill_color,
            alpha=alpha,
            linewidth=0.5,
            label=band_label,
        )
        self.ax.plot(x, np.asarray(band.mean).flatten(), mean_color, linewidth=2.0, label=mean_label)

    def plotsamples(self, x, samples, color=None, linewidth=0.8, alpha=0.7):
        """Sample paths; `samples` has one path per row."""
        x = np.asarray(x).flatten()
        for path in np.atleast_2d(samples):
            self.ax.plot(x, path, color=color, linewidth=linewidth, alpha=alpha)

    def plotcontour(self, contours, levels=8, cmap="viridis", marker=None):
        """Density contours from a ContourData grid.

        Parameters
        ----------
        contours : ContourData
            density[j, i] is the value at (x_grid[i], y_grid[j]).
        levels : int, optional
        marker : (float, float), optional
            Point to highlight, e.g. the true (slope, intercept).
        """
        self.ax.contour(
            contours.x_grid, contours.y_grid, contours.density, levels=levels, cmap=cmap
        )
        if marker is not None:
            self.ax.plot(marker[0], marker[1], "k+", markersize=10)
