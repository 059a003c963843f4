# coherent_noise/errors.py

"""Exception types raised by the noise kernels and the kernel factory."""


class NoiseError(Exception):
    """Base class for every error raised by coherent_noise."""


class UnsupportedDimensionError(NoiseError, NotImplementedError):
    """
    Raised when a kernel is queried in a dimension it does not implement.
    This is a contract violation by the caller, check `kernel.supports_3d`
    before issuing 3D queries.
    """

    def __init__(self, kernel_name: str, dimension: int):
        self.kernel_name = kernel_name
        self.dimension = dimension
        super().__init__(f"{kernel_name} does not implement {dimension}D noise")


class UnknownKernelError(NoiseError, KeyError):
    """Raised by the factory for a kernel name that is not registered."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = tuple(available)
        super().__init__(f"Unknown kernel '{name}'. Available: {', '.join(self.available)}")

    def __str__(self):
        # KeyError would otherwise repr() the message.
        return self.args[0]
