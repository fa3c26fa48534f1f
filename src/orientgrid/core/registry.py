# The registry of named patterns
PATTERN_REGISTRY = {}

# The registry of rotation sampler classes
ROTATION_SAMPLER_REGISTRY = {}

def register_pattern(name: str):
    def deco(fn):
        PATTERN_REGISTRY[name] = fn
        return fn
    return deco

def register_rotation_sampler(kind: str):
    def deco(cls):
        ROTATION_SAMPLER_REGISTRY[kind] = cls
        return cls
    return deco
