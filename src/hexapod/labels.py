"""
Log and console strings for the Hexapod controller.

Every user-facing message lives here so components only reference names.
"""

# Gait state machine
STATE_TRANSITION = 'State={}'
STATE_UNKNOWN = 'Unknown gait state: {}'
STATE_LEG_ACTIVATED = 'Leg {} initialized ({} of {})'
STATE_LEG_GROUP = 'Stepping leg group {} of {}: {}'

# Safety monitor
SAFETY_VOLTAGE = 'voltage: {:.2f}v'
SAFETY_LOW_VOLTAGE = 'Voltage {:.2f}v is below the {:.2f}v cutoff, halting immediately'
SAFETY_READ_ERROR = 'Unable to read voltage: {}'

# Legs
LEG_UNREACHABLE = 'Leg {} cannot reach target {}'
LEG_JOINT_LIMIT = 'Leg {} {} angle {:.1f} is outside the servo travel of +/-{} degrees'
LEG_NOT_READY = 'Leg {} received a move before it was initialized'
LEG_TRANSPORT_ERROR = 'Leg {} move failed: {}'
LEG_RELAX_ERROR = 'Servo {} could not be relaxed: {}'

# Hexapod body
HEXAPOD_HALT_REQUESTED = 'Halt requested'
HEXAPOD_EXIT_REQUESTED = 'Exit with error code requested by operator'
HEXAPOD_SHUTDOWN = 'Moving legs to the parked pose'
HEXAPOD_RELAXED = 'All servos relaxed'
HEXAPOD_BUS_FAILURE = 'Actuator bus failure, de-energizing servos: {}'
HEXAPOD_LOOP_STOPPED = 'Control loop stopped after {} ticks'
HEXAPOD_OVERRUN = 'Tick took {:.1f}ms, longer than the {:.1f}ms period'

# Actuator bus
BUS_OPENING = 'Opening actuator bus on {} at {} baud'
BUS_OPEN_ERROR = 'Failed to open port {}'
BUS_BAUD_ERROR = 'Failed to set baud rate {} on {}'
BUS_COMM_ERROR = 'Servo {} communication error: {}'
BUS_PACKET_ERROR = 'Servo {} reported error: {}'
BUS_ANGLE_OUT_OF_RANGE = 'Angle {:.2f} for servo {} is outside the servo range'
BUS_BATCH_ALREADY_OPEN = 'A batch is already open'
BUS_CLOSED = 'Actuator bus closed'

# Configuration
CONFIG_LOADED = 'Loaded gait parameters from {}'
CONFIG_DEFAULTS = 'No gait parameter file at {}, using defaults'
CONFIG_NOT_FOUND = 'Gait parameter file not found: {}'
CONFIG_MALFORMED = 'Gait parameter file {} is not a JSON object: {}'
CONFIG_UNKNOWN_KEYS = 'Unknown gait parameters: {}'
CONFIG_INVALID_LEG_SET_SIZE = 'Invalid leg set size {}, expected 1, 2 or 3'
CONFIG_INVALID_INIT_ORDER = 'Init order {} must be a permutation of the leg indices 0 to {}'
CONFIG_INVALID_TYPE = 'Gait parameter {} must be {}, got {!r}'
CONFIG_NOT_POSITIVE = 'Gait parameter {} must be positive, got {}'
CONFIG_INVALID_LEG_COUNT = 'Expected {} legs, got {}'

# Abort controller
ABORT_SIGNAL = 'Received signal {}, requesting halt'

# Remote controller
REMOTE_LOOKING_FOR_DEVICES = 'Looking for connected devices: {}'
REMOTE_OPEN_SUCCESS = '{} opened successfully.'
REMOTE_OPEN_ERROR = 'Could not open {}: {}'
REMOTE_NOT_FOUND = 'Joystick {} not found in {}'
REMOTE_CONNECTED_TO = 'Connected to device: {}'
REMOTE_AXES_FOUND = '{} axes found: {}'
REMOTE_BUTTONS_FOUND = '{} buttons found: {}'
REMOTE_READ_ERROR = 'Error reading joystick events: {}'
REMOTE_CLOSE_WARNING = 'Error closing device: {}'

# Main
MAIN_STARTING = 'Hexapod starting...'
MAIN_TERMINATED_NORMAL = 'Normal termination'
MAIN_TERMINATED_EXIT_CODE = 'Terminated with exit code {}'
MAIN_FATAL_ERROR = 'Fatal error: {}'
