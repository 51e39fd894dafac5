### Leg Geometry Constants ###
# Segment lengths and offsets of one leg (in mm)
COXA_LENGTH = 39.0
COXA_DROP = -12.0
FEMUR_LENGTH = 100.0
TIBIA_LENGTH = 85.0
TARSUS_LENGTH = 76.5

# The femur pivot is compared against the point PLUMB_DEPTH mm straight below it
PLUMB_DEPTH = 50.0

# The femur servo is mounted mirrored relative to the other joints
FEMUR_SERVO_DIRECTION = -1.0

# Commanded joint angles must stay inside the servo travel (AX-12 goal
# positions 0..1023 cover +/-150 degrees)
SERVO_ANGLE_LIMIT = 149.8

### Leg Count ###
LEG_COUNT = 6

### Shutdown Pose ###
PARK_COXA = 0.0
PARK_FEMUR = -60.0
PARK_TIBIA = 60.0
PARK_TARSUS = 60.0
PARK_MOVING_SPEED = 128
PARK_SETTLE_TIME = 2.0

### Servo Status Return Levels ###
STATUS_RETURN_READ_ONLY = 1
STATUS_RETURN_ALL = 2

### Remote Controller Constants ###
STICK_RANGE = 127
TRIGGER_RANGE = 255
AXIS_RAW_RANGE = 32767
DEVICE_PATH = '/dev/input'
JSDEV_READ_SIZE = 8

# Linux joystick ioctl request codes (linux/joystick.h)
JSIOCGAXES = 0x80016A11
JSIOCGBUTTONS = 0x80016A12
JSIOCGNAME = 0x80006A13
JSIOCGAXMAP = 0x80406A32
JSIOCGBTNMAP = 0x84006A34

### Actuator Bus Defaults ###
DEFAULT_SERIAL_PORT = '/dev/ttyUSB0'
DEFAULT_BAUD_RATE = 1000000
DEFAULT_JOYSTICK = 'js0'

### Floating Point Tolerance ###
ACOS_TOLERANCE = 1e-9
