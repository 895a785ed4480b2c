'''GP prior and conditional sample paths, with a gap in the data

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3 (see LICENSE)
'''
import bayreg as br
import bayreg.misc.plotutils as plotutils


def main():
    xt = br.misc.datasets.regular_grid(0.0, 10.0, 120)
    xi, zi = br.misc.datasets.make_gap_data(12, gap_start=3.0, gap_end=7.0, seed=42)

    kernel = br.kernel.Matern32Kernel(length_scale=1.5, signal_variance=1.0)
    model = br.GaussianProcess(kernel, noise_variance=0.04)

    # prior sample paths
    n_samplepaths = 5
    zsim = model.sample_prior(xt, n_samplepaths, rng=42)

    fig = plotutils.Figure(nrows=1, ncols=2, isinteractive=True)
    fig.plotsamples(xt, zsim)
    fig.title('Prior sample paths')

    # conditional sample paths
    model.fit(xi, zi)
    band = model.get_credible_band(xt, level=0.95)
    zpsim = model.sample_posterior(xt, n_samplepaths, rng=42)

    fig.subplot(2)
    fig.plotband(xt, band)
    fig.plotsamples(xt, zpsim)
    fig.plotdata(xi, zi)
    fig.title('Conditional sample paths')
    fig.show(grid=True)


if __name__ == '__main__':
    main()
