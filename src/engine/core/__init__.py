"""
どこで: `engine.core` サブパッケージ。
何を: Geometry・フレーム駆動（Tickable/FrameClock）・表示面 Protocol・描画ウィンドウを提供。
なぜ: シミュレーションと描画の基盤を構成し、上位層（sim/render/ui）から再利用可能にするため。
"""
