"""
Bayesian linear regression: posterior predictive band and sampled lines,
compared with ordinary least squares

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import bayreg.num as bnp
import bayreg as br
import bayreg.misc.plotutils as plotutils

TRUE_SLOPE = 1.5
TRUE_INTERCEPT = 2.0
NOISE_STD = 1.5


def main():
    xi, zi = br.misc.datasets.make_bayesian_linear_data(
        20, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD, seed=42
    )
    xt = br.misc.datasets.regular_grid(-3.0, 7.0, 100)

    for preset in ["uninformed", "informative", "wrong"]:
        model = br.BayesianLinearRegression.from_preset(preset, noise_variance=NOISE_STD**2)
        model.fit(xi, zi)
        print(f"[{preset}]")
        print(model)

        band = model.get_credible_band(xt, level=0.95)
        lines = model.sample_posterior_lines(xt, 10, rng=7)
        ols = model.ols_estimate(xi, zi)

        fig = plotutils.Figure(isinteractive=True)
        fig.plotband(xt, band, mean_label='posterior mean')
        fig.plotsamples(xt, lines, color='#4C72B0', linewidth=0.5, alpha=0.5)
        fig.plot(xt, ols.intercept + ols.slope * xt, 'k--', label='OLS')
        fig.plot(xt, TRUE_INTERCEPT + TRUE_SLOPE * xt, 'g', linewidth=1, label='truth')
        fig.plotdata(xi, zi)
        fig.xylabels('$x$', '$y$')
        fig.title(f'Bayesian linear regression, {preset} prior')
        fig.show(grid=True, legend=True, legend_fontsize=9)

    print('\nPosterior variance at x = 2')
    print('---------------------------')
    model = br.BayesianLinearRegression(noise_variance=NOISE_STD**2)
    for n in [0, 5, 20, 100]:
        x, y = br.misc.datasets.make_bayesian_linear_data(
            n, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD, seed=42
        )
        model.fit(x, y)
        mean, variance = model.predict(2.0)
        print(f"n = {n:3d}: mean = {mean:.3f}, sd = {bnp.sqrt(variance):.3f}")


if __name__ == '__main__':
    main()
