"""
どこで: `engine.render` のシェーダ定義。
何を: キャンバス座標（px, Y 下向き）の頂点を頂点色で塗るだけの最小プログラムを生成。
なぜ: 形状ごとの色を頂点属性で渡し、全形状を 1 回の draw call で描くため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec4 in_color;
out vec4 v_color;
void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
    v_color = in_color;
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 frag_color;
void main() {
    frag_color = v_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """塗りつぶし用の moderngl Program を生成する。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
