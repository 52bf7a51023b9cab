"""Seven-parameter Helmert transformation between the cartesian frames of
two datums.
"""

from .errors import DatumMismatchError
from .vectors import CartesianCoordinate, HelmertParameters

__all__ = ("HelmertTransformation",)


class HelmertTransformation:
    """Similarity transformation (scale, small-angle rotation and
    translation) from the cartesian frame of one datum to another.

    The rotation is applied in its first-order approximation, which is
    accurate for the sub-arc-second rotations between terrestrial datums.
    """

    _parameters: HelmertParameters

    def __init__(self, parameters: HelmertParameters):
        """Constructor.

        Parameters:
            parameters: the parameters of the transformation
        """
        self._parameters = parameters

    @property
    def parameters(self) -> HelmertParameters:
        """The parameters of the transformation."""
        return self._parameters

    @property
    def inverse(self) -> "HelmertTransformation":
        """The transformation in the opposite direction, with all seven
        parameters negated.
        """
        return self.__class__(self._parameters.inverse)

    def apply(self, coord: CartesianCoordinate) -> CartesianCoordinate:
        """Transforms a coordinate from the source frame to the target frame.

        Parameters:
            coord: the coordinate to transform, in the source frame

        Returns:
            the transformed coordinate, in the target frame

        Raises:
            DatumMismatchError: if the coordinate is not in the source frame
        """
        return _transform(coord, self._parameters)

    def apply_inverse(self, coord: CartesianCoordinate) -> CartesianCoordinate:
        """Transforms a coordinate from the target frame back to the source
        frame using the negated parameter set. This is not an exact inverse
        of apply().
        """
        return _transform(coord, self._parameters.inverse)


def _transform(
    coord: CartesianCoordinate, params: HelmertParameters
) -> CartesianCoordinate:
    if coord.ellipsoid != params.source:
        raise DatumMismatchError(params.source, coord.ellipsoid)

    x, y, z = coord.x, coord.y, coord.z
    s = 1 + params.scale
    rx, ry, rz = params.rx, params.ry, params.rz

    return CartesianCoordinate(
        x=params.tx + s * x - rz * y + ry * z,
        y=params.ty + rz * x + s * y - rx * z,
        z=params.tz - ry * x + rx * y + s * z,
        ellipsoid=params.target,
    )
