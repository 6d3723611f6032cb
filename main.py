import time
import numpy as np
from functools import lru_cache
import pyviewer
from pyviewer.toolbar_viewer import AutoUIViewer
from pyviewer.params import *
from imgui_bundle import implot, implot3d
import glfw
from lds import *

assert pyviewer.__version__ >= '2.0.0', 'pyviewer 2.0.0+ required'

# Interactive viewer for the generators in lds.
# Plots two or three coordinates of the first N points of a sequence.
# Points on S^(n-1) for n > 3 are shown as coordinate projections,
# which is also a quick way to compare SphereN against CylinN.

MAX_DIM = 8

def halton(N: int, seed: int):
    return sample(Halton(get_primes(2)), N, seed)

def halton_n(N: int, seed: int):
    return sample(HaltonN(get_primes(MAX_DIM)), N, seed)

def circle(N: int, seed: int):
    return sample(Circle(2), N, seed)

def sphere(N: int, seed: int):
    return sample(Sphere(get_primes(2)), N, seed)

def sphere3_hopf(N: int, seed: int):
    return sample(Sphere3Hopf(get_primes(3)), N, seed)

def sphere_4(N: int, seed: int):
    return sample(SphereN(get_primes(3)), N, seed)

def sphere_n(N: int, seed: int):
    return sample(SphereN(get_primes(MAX_DIM - 1)), N, seed)

def cylin_n(N: int, seed: int):
    return sample(CylinN(get_primes(MAX_DIM - 1)), N, seed)

@strict_dataclass
class State(ParamContainer):
    N: Param = IntParam('Samples', 512, 1, 8192)
    seq: Param = EnumParam('Sequence', sphere, [
        halton,       # 2D Halton, bases 2 and 3
        halton_n,     # Halton over the first MAX_DIM primes
        circle,       # Unit circle, base 2
        sphere,       # S^2, cos(phi) uniform (Archimedes)
        sphere3_hopf, # S^3, closed form via Hopf fibration
        sphere_4,     # S^3, tabulated polar angle
        sphere_n,     # S^(MAX_DIM-1), tabulated polar angles
        cylin_n,      # S^(MAX_DIM-1), cylindrical projection (non-uniform for n > 3)
    ], lambda f: f.__name__)
    seed: Param = IntParam('Seed', 0, 0, 99, buttons=True)
    dim1: Param = IntParam('X dimension', 0, 0, MAX_DIM - 1, buttons=True)
    dim2: Param = IntParam('Y dimension', 1, 0, MAX_DIM - 1, buttons=True)
    dim3: Param = IntParam('Z dimension', 2, 0, MAX_DIM - 1, buttons=True)
    plot3d: Param = BoolParam('3D', False)

class Viewer(AutoUIViewer):
    def setup_state(self):
        implot3d.create_context()
        self.draw_scale_buttons = False
        self.arr_create_time = 0
        self.state = State()

    @lru_cache(maxsize=1)
    def get_points(self, fun, N, seed):
        return fun(N, seed)

    def get_data(self, fun, N, seed, dim1, dim2, dim3):
        pts = self.get_points(fun, N, seed) # cached
        d = pts.shape[1]
        return np.ascontiguousarray(pts[:, dim1 % d]), \
               np.ascontiguousarray(pts[:, dim2 % d]), \
               np.ascontiguousarray(pts[:, dim3 % d])

    def draw_pre(self):
        state = self.state
        W, H = glfw.get_window_size(self.v._window)
        style = imgui.get_style()
        avail_h = H - self.menu_bar_height - 2*style.window_padding.y - self.pad_bottom
        avail_w = W - self.toolbar_width
        t0 = time.monotonic()
        xs, ys, zs = self.get_data(state.seq, state.N, state.seed, state.dim1, state.dim2, state.dim3)
        self.arr_create_time = time.monotonic() - t0

        if state.plot3d:
            if implot3d.begin_plot('LDS##3D', size=(avail_w, avail_h)):
                implot3d.set_next_marker_style(size=6*self.ui_scale)
                implot3d.setup_box_scale(1.2, 1.2, 1.2)
                implot3d.plot_scatter('Sequence', xs, ys, zs)
                implot3d.end_plot()
        else:
            if implot.begin_plot('LDS##2D', size=(avail_w, avail_h), flags=implot.Flags_.equal):
                implot.set_next_marker_style(size=6*self.ui_scale)
                implot.plot_scatter('Sequence', xs=xs, ys=ys)
                implot.end_plot()

    def draw_toolbar_autoUI(self, containers=None):
        self.state['dim3'].active = self.state.plot3d
        draw_container(self.state, reset_button=True)
        imgui.text(f'Arr: {self.arr_create_time*1000:.0f}ms')

if __name__ == '__main__':
    viewer = Viewer('LDS viewer')
