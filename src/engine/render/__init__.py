"""
どこで: `engine.render` サブパッケージ。
何を: 形状輪郭 → GPU 転送・塗りつぶし描画の入口。FillRenderer/FillMesh/Shader を提供。
なぜ: シミュレーション（sim）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
