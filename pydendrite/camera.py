class Camera:
    """
    View parameters for an external 3D renderer. Has no effect on the simulation itself

    Attributes
    ----------

    rotation_x : float
        Pitch in degrees, clamped to ROTATION_X_RANGE
    rotation_y : float
        Yaw in degrees, unbounded
    distance : float
        Distance from the origin, clamped to DISTANCE_RANGE
    """
    ROTATION_X_RANGE = (-85., 85.)
    DISTANCE_RANGE = (0.5, 15.)

    def __init__(self, rotation_x=30., rotation_y=45., distance=3.):
        self.rotation_x = rotation_x
        self.rotation_y = rotation_y
        self.distance = distance

    def rotate(self, delta_x, delta_y):
        #delta_x turns around the vertical axis, delta_y tilts
        self.rotation_y += delta_x
        self.rotation_x = min(max(self.rotation_x + delta_y, self.ROTATION_X_RANGE[0]), self.ROTATION_X_RANGE[1])

    def zoom(self, delta):
        self.distance = min(max(self.distance + delta, self.DISTANCE_RANGE[0]), self.DISTANCE_RANGE[1])
