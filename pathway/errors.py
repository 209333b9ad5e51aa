# /pathway/errors.py


class PathwayEngineError(Exception):
    """Base class for every error raised by the pathway engine."""


# --- Graph store ---

class GraphStoreError(PathwayEngineError):
    pass


class DuplicateNodeError(GraphStoreError):
    def __init__(self, kind: str, name: str):
        super().__init__(f"A {kind} named '{name}' already exists.")
        self.kind = kind
        self.name = name


class UnknownNodeError(GraphStoreError):
    def __init__(self, node_id: str):
        super().__init__(f"Node '{node_id}' does not exist.")
        self.node_id = node_id


class InvalidWeightError(GraphStoreError):
    def __init__(self, strength):
        super().__init__(f"Relationship strength must be in (0, 1], got {strength!r}.")
        self.strength = strength


# --- Pathway generation ---

class PathwayGenerationError(PathwayEngineError):
    """
    Raised to callers when a pathway cannot be produced. The message never
    carries internal detail.
    """
    def __init__(self, message: str = "Unable to generate learning pathway"):
        super().__init__(message)


class UnknownRoleError(PathwayGenerationError):
    """The role has neither a graph node nor a requirement table entry."""
    def __init__(self, role_name: str):
        super().__init__(f"Role '{role_name}' not found.")
        self.role_name = role_name


# --- Resource discovery (recovered locally) ---

class DiscoveryStrategyError(PathwayEngineError):
    pass


class ValidationTimeoutError(PathwayEngineError):
    def __init__(self, url: str, timeout: float):
        super().__init__(f"Reachability check for {url} timed out after {timeout}s.")
        self.url = url
        self.timeout = timeout
