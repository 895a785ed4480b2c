"""
GP regression of noisy sine observations, with a 95% credible band

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import bayreg.num as bnp
import bayreg as br
import bayreg.misc.plotutils as plotutils


def generate_data():
    """
    Data generation.

    Returns
    -------
    tuple
        (xt, zt): target data
        (xi, zi): observations
    """
    xt = br.misc.datasets.regular_grid(0.0, 10.0, 200)
    zt = bnp.sin(xt)
    xi, zi = br.misc.datasets.make_sine_data(15, 0.2, seed=42)
    return xt, zt, xi, zi


def visualize_results(xt, zt, xi, zi, band, title):
    fig = plotutils.Figure(isinteractive=True)
    fig.plot(xt, zt, 'k', linewidth=1, linestyle=(0, (5, 5)), label='truth')
    fig.plotband(xt, band, band_label='95% credible band')
    fig.plotdata(xi, zi)
    fig.xylabels('$x$', '$y$')
    fig.title(title)
    fig.show(grid=True, xlim=[0.0, 10.0], legend=True, legend_fontsize=9)


def main():
    xt, zt, xi, zi = generate_data()

    for kernel_type in ["rbf", "matern", "periodic"]:
        kernel = br.kernel.create_kernel(kernel_type, length_scale=1.0, signal_variance=1.0)
        model = br.GaussianProcess(kernel, noise_variance=0.1)
        model.fit(xi, zi)

        band = model.get_credible_band(xt, level=0.95)
        print(f"{kernel.name:>12s}: log marginal likelihood = {model.log_marginal_likelihood():.3f}")

        visualize_results(xt, zt, xi, zi, band, f"GP posterior, {kernel.name} kernel")


if __name__ == '__main__':
    main()
