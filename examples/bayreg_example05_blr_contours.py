"""
Prior and posterior densities of (slope, intercept) as data arrive

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import bayreg as br
import bayreg.misc.plotutils as plotutils


def main():
    true_slope, true_intercept, noise_std = 1.5, 2.0, 1.5
    slope_range = (-2.0, 5.0)
    intercept_range = (-3.0, 7.0)
    resolution = 60

    model = br.BayesianLinearRegression(noise_variance=noise_std**2)

    sizes = [0, 2, 10, 50]
    fig = plotutils.Figure(nrows=1, ncols=len(sizes), isinteractive=True, figsize=(14, 4))
    for i, n in enumerate(sizes):
        x, y = br.misc.datasets.make_bayesian_linear_data(
            n, true_slope, true_intercept, noise_std, seed=42
        )
        model.fit(x, y)
        if n == 0:
            contours = model.get_prior_contours(slope_range, intercept_range, resolution)
        else:
            contours = model.get_posterior_contours(slope_range, intercept_range, resolution)

        fig.subplot(i + 1)
        fig.plotcontour(contours, marker=(true_slope, true_intercept))
        fig.xylabels('slope', 'intercept')
        fig.title(f'n = {n}')
    fig.show()


if __name__ == '__main__':
    main()
