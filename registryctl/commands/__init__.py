from .install import install_cmd
from .render import render_cmd
from .doctor import doctor_cmd

__all__ = ['install_cmd', 'render_cmd', 'doctor_cmd']
