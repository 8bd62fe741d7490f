"""Install TensorFlow into a conda environment, virtualenv, or system Python."""

from tf_installer.install import install_tensorflow
from tf_installer.models import InstallMethod, InstallRequest

__all__ = ["InstallMethod", "InstallRequest", "install_tensorflow"]
