"""Scene geometry for a small ray tracer: vectors, matrices, meshes, spheres, planes, lights, worlds and OBJ loading."""

__version__ = "0.1.0"