"""floormap: indoor map annotation backend (maps → floors → pins, anonymous public editors)."""
