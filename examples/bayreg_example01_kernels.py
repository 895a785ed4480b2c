""" Plot the covariance profiles k(0, h) of the available kernels

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import bayreg.num as bnp
import bayreg as br
import bayreg.misc.plotutils as plotutils


def main():
    h = bnp.linspace(-5.0, 5.0, 500)

    fig = plotutils.Figure()

    for kernel_type in br.kernel.KERNEL_TYPES:
        kernel = br.kernel.create_kernel(kernel_type, length_scale=1.0, signal_variance=1.0)
        if kernel_type == "linear":
            # not stationary: the profile depends on the reference point
            k = kernel.profile(h, reference=kernel.center + 1.0)
        else:
            k = kernel.profile(h)
        fig.plot(h, k, label=kernel.name)

    fig.title('Covariance profiles')
    fig.xylabels('$h$', '$k(x_0, x_0 + h)$')
    fig.show(grid=True, legend=True)


if __name__ == '__main__':
    main()
