"""Offline recursive (Whitted-style) ray tracer.

This package renders scenes of simple primitives lit by a point light, with
support for:
- Phong shading with hard shadows
- Recursive mirror reflection and refraction with Fresnel (Schlick) blending
- Spheres, planes, cubes, and truncated/capped cylinders and cones
- Procedural stripe, gradient, ring and checker patterns
- Rendering into a Taichi field and export to PPM or PNG

Subpackages:
    core: Tuples, colors, matrices, rays and the canvas
    geometry: Shape primitives and intersection records
    materials: Materials, patterns and Phong lighting
    scene: Lights, the world, scene building and presets
    camera: Pinhole camera and the render loop
    preview: Tone mapping and image export
"""

__version__ = "0.1.0"
