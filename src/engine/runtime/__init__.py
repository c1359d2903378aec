"""
どこで: `engine.runtime` サブパッケージ。
何を: 描画フレームとは独立に動く周期処理（形状生成タイマー）を提供。
なぜ: 生成テンポとフレーム更新の責務を分離し、レート変更を局所化するため。
"""
