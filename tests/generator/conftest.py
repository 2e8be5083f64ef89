"""
Pytest configuration and shared fixtures for generator tests.

This module contains shader sources shared across multiple test modules.
"""

import textwrap

import pytest


@pytest.fixture
def lighting_source():
    """Fixture providing a shader file with custom groups and comments."""
    return textwrap.dedent(
        """
        #include <metal_stdlib>
        using namespace metal;

        /// Vertex input for standard pipeline
        struct VertexIn {
            float4 position [[attribute(0)]]; // Pos
        };

        // Plain vertex stage
        vertex float4 vertex_main(
            const device VertexIn* vert [[buffer(0)]],
            uint vid [[vertex_id]] /* vertex index */
        ) {
            return vert[vid].position;
        }

        //MTLShaderGroup: Lighting
        fragment float4 light_fragment() { return float4(1); }

        /* kernel void commented_out() {} */
        kernel void light_kernel(device float* out [[buffer(0)]]) {}
        """
    )


@pytest.fixture
def post_source():
    """Fixture providing a second shader file sharing a group."""
    return textwrap.dedent(
        """
        // MTLShaderGroup: Lighting
        kernel void light_kernel() {}
        //MTLShaderGroup: Post
        compute void bloom() {}
        """
    )
