"""
Our data: doormat color palettes (24-bit hex RGB). Used by the palette registry.
Order matters: the first entry is the default palette and uniform picks index into this list.
"""
# Each entry is (name, colors); colors are ordered and never empty
PALETTE_DATA: list[tuple[str, list[str]]] = [
    # --- Muted classics ---
    ("Muted Earthy", ["#8B7355", "#A0522D", "#CD853F", "#DEB887", "#D2B48C", "#BC8F8F", "#F5DEB3", "#F4E4BC"]),
    ("Muted Traditional", ["#8B2635", "#556B2F", "#4B5D6B", "#B8860B", "#654321", "#2F4F2F", "#2F4F4F", "#F5F5DC"]),
    ("Muted Ocean", ["#5F7A7A", "#6B8E8E", "#4A6B7A", "#5F7A6B", "#6B6B7A", "#4A5F6B", "#E8F0F0", "#D4E6E6"]),
    ("Muted Sunset", ["#8B4513", "#A0522D", "#CD853F", "#D2691E", "#8B0000", "#A0522D", "#F5DEB3", "#F4E4BC"]),
    ("Coir Natural", ["#7A5230", "#9C6B3C", "#B98550", "#D1A46C", "#E4C38F", "#5C3A1E"]),
    ("Jute Sack", ["#A68A64", "#C2A878", "#D8C49A", "#8E7350", "#6F5A3C", "#EDE0C4"]),
    ("Farmhouse", ["#F2EDE4", "#C9B8A3", "#7D6B5D", "#3E4A3D", "#A23E2E", "#DCCFB8"]),
    ("Cottage Garden", ["#7C9A6D", "#B5C99A", "#E8D5B5", "#C97B84", "#8A5A83", "#F4EEDC"]),
    ("Slate Stone", ["#4F5B66", "#65737E", "#A7ADBA", "#C0C5CE", "#343D46", "#E5E8EC"]),
    ("Charcoal Linen", ["#2B2B2B", "#4A4A4A", "#6E6E6E", "#A8A39D", "#D7D2CB", "#F0EDE8"]),
    ("Harvest Field", ["#C89B3C", "#E3B55B", "#8C6A2F", "#5E4B2B", "#A7753A", "#F2DFA7"]),
    ("Autumn Leaves", ["#8C2F1B", "#B5441F", "#D9782D", "#E8A33D", "#6B4226", "#F1D6A5"]),
    ("Winter Frost", ["#E8EEF2", "#C7D3DD", "#9FB3C8", "#6C87A3", "#3F5872", "#1F2E40"]),
    ("Spring Meadow", ["#A8C686", "#6E9B4E", "#F3E9A5", "#E9B872", "#D77A61", "#FAF3DD"]),
    ("Desert Dune", ["#C2956B", "#D9B48F", "#E9CFA7", "#A0714F", "#7A4E33", "#F6E7CB"]),
    ("Terracotta", ["#B5563C", "#CD6F4E", "#E39A74", "#8A3B28", "#5B2A1C", "#F2D0B4"]),
    ("Olive Grove", ["#556B2F", "#6B8E23", "#8F9779", "#BDB76B", "#3B4A22", "#E6E2C3"]),
    ("Nordic Wool", ["#F5F1E9", "#D9D2C5", "#1E2A38", "#8C2F39", "#4E6E81", "#B8B08D"]),
    ("Sea Glass", ["#A3C6C4", "#6C9A8B", "#E0ECE4", "#3E6259", "#C8D5B9", "#F6F7EB"]),
    ("Lavender Field", ["#B8A1D9", "#8E7CC3", "#5E4B8B", "#E3DAF5", "#C7B9E8", "#3C2F5C"]),
    ("Citrus Grove", ["#F4A300", "#FFC93C", "#F26B38", "#9BC53D", "#5B8C2A", "#FFF4D6"]),
    ("Berry Patch", ["#6B1E3A", "#9E2A4E", "#C94C6E", "#E58FA3", "#3D1A2B", "#F7DDE3"]),
    ("Midnight Navy", ["#0B1D3A", "#1C3660", "#2E5090", "#A8B8D8", "#E3E9F4", "#C9A227"]),
    ("Rustic Barn", ["#7B2D26", "#A63D2F", "#D9C5A0", "#4A3728", "#8C7B6B", "#EFE6D2"]),
    ("Coffee House", ["#3B2417", "#5C3B28", "#8B5E3C", "#C19A6B", "#E6D2B5", "#F7EFE2"]),
    ("Moss Stone", ["#4B5D3A", "#6E7F4F", "#9AA57A", "#7A7466", "#4D4A43", "#D9D6C7"]),
    ("Clay Pot", ["#A4552F", "#C46D45", "#D99A6C", "#7C3F22", "#EBC9A8", "#5A2E18"]),
    ("Sandstone", ["#D8B68A", "#C49A6C", "#E9D3B0", "#A9825A", "#7F5F3F", "#F5EAD6"]),
    ("Seaside Cabin", ["#2D5D7B", "#4F8AAB", "#A9CCE3", "#F2E8CF", "#C0392B", "#FDFBF4"]),
    ("Vintage Denim", ["#1F3B5A", "#2F5275", "#5B7FA3", "#9DB4CC", "#D6E1EC", "#EDE6D6"]),
    ("Scandi Minimal", ["#FFFFFF", "#EDEDED", "#C8C8C8", "#2E2E2E", "#D4A373", "#8A9A5B"]),
    ("Persian Rug", ["#7D1128", "#A4243B", "#D8973C", "#1B3A5C", "#2E6171", "#F2E3BC", "#3C1518"]),
    ("Moroccan Tile", ["#1D5C63", "#2A9D8F", "#E9C46A", "#F4A261", "#E76F51", "#FBF2E3"]),
    ("Navajo", ["#9B2915", "#E9B44C", "#1C110A", "#F2E8CF", "#50A2A7", "#6B4226"]),
    ("Kilim", ["#8E1B1B", "#C2571A", "#E1A140", "#2B4162", "#385F71", "#F2E2C4", "#3A2618"]),
    ("Ikat Weave", ["#233D4D", "#FE7F2D", "#FCCA46", "#A1C181", "#619B8A", "#F7F1E1"]),
    ("Batik", ["#3D2B1F", "#7F4F24", "#B08968", "#DDB892", "#1B4965", "#EDE0D4"]),
    ("Tartan", ["#1B3B2F", "#7A1F1F", "#0F2340", "#D6B85A", "#E8E2D0", "#2A2A2A"]),
    ("Bauhaus", ["#D62828", "#F77F00", "#FCBF49", "#003049", "#EAE2B7", "#111111"]),
    ("Pop Art", ["#FF006E", "#FB5607", "#FFBE0B", "#3A86FF", "#8338EC", "#FFFFFF"]),
    ("Neon Night", ["#0D0221", "#261447", "#FF3864", "#2DE2E6", "#F6019D", "#FFD319"]),
    ("Pastel Dream", ["#FFD6E0", "#FFEFCF", "#D4F0F0", "#CCE2CB", "#B6CFB6", "#97C1A9"]),
    ("Monochrome", ["#000000", "#333333", "#666666", "#999999", "#CCCCCC", "#FFFFFF"]),
    ("Sepia Print", ["#704214", "#8B5A2B", "#A67B5B", "#C8A27C", "#E3CBA8", "#F6EBDD"]),
    # --- Tamil Nadu and South India ---
    ("Tamil Nadu Temple", ["#B22222", "#DAA520", "#FF8C00", "#8B0000", "#FFD700", "#F5DEB3", "#4B0082"]),
    ("Kerala Onam", ["#FFFFFF", "#F5E6C8", "#D4AF37", "#228B22", "#FF8C00", "#8B4513"]),
    ("Chettinad Spice", ["#8B3A1A", "#C1440E", "#E07A1F", "#F2C14E", "#5C2E0E", "#EAD9B8"]),
    ("Chennai Monsoon", ["#2F4F4F", "#4682B4", "#708090", "#5F9EA0", "#B0C4DE", "#E0E8F0"]),
    ("Tamil Classical", ["#800000", "#B8860B", "#006400", "#FFD700", "#4B0082", "#FFF8DC"]),
    ("Sangam Era", ["#6B3E26", "#A0522D", "#D2B48C", "#2E8B57", "#DAA520", "#F5F5DC"]),
    ("Pandya Dynasty", ["#003366", "#C0C0C0", "#DAA520", "#8B0000", "#F0E68C", "#FFFFFF"]),
    ("Chola Dynasty", ["#8B0000", "#FFD700", "#B8860B", "#4B0082", "#CD7F32", "#FFF8DC", "#2F1B0C"]),
    ("Madras Checks", ["#C8102E", "#FFD100", "#0033A0", "#009639", "#FF6A13", "#FFFFFF"]),
    ("Kanchipuram Silk", ["#9B111E", "#D4AF37", "#006A4E", "#4B0082", "#FF7F50", "#FFD700"]),
    ("Jamakalam", ["#B22222", "#FFD700", "#006400", "#00008B", "#FF8C00", "#F5F5DC"]),
    # --- Bengal and the north ---
    ("Bengal Indigo", ["#1A1F71", "#2E3A87", "#4B5BA6", "#8C9CD0", "#D9DEF0", "#F5F3EA"]),
    ("Indigo Famine", ["#0F1740", "#1E2A5A", "#3B4A7A", "#6B6F80", "#A39E93", "#D8D2C4"]),
    ("Bengal Famine", ["#3E2F22", "#5E4B3C", "#8C7B6B", "#B5A48F", "#D6C9B1", "#2A211A"]),
    ("Rajasthani", ["#E63946", "#F4A261", "#E9C46A", "#2A9D8F", "#264653", "#FFB5A7", "#FFD700"]),
    ("Maratha Empire", ["#FF6F00", "#8B4513", "#FFD700", "#800000", "#2F4F4F", "#FFF5E1"]),
    ("Maurya Empire", ["#4B2E83", "#D4AF37", "#8B0000", "#F5F5DC", "#2F4F4F", "#CD853F"]),
    ("Buddhist", ["#FF9933", "#FFD700", "#8B0000", "#FFFFFF", "#0052A5", "#E6B800"]),
    ("Indian Flag", ["#FF9933", "#FFFFFF", "#138808", "#000080"]),
    ("Natural Dyes", ["#7B3F00", "#C04000", "#E1AD01", "#264E36", "#1C2E5B", "#EDE4D3", "#9C2D41"]),
    ("Bleeding Vintage", ["#8A1C1C", "#B23A48", "#D98E73", "#F1C6A8", "#3D405B", "#F4EDE1"]),
    # --- Birds ---
    ("Peacock", ["#005F73", "#0A9396", "#94D2BD", "#1B4332", "#7B2CBF", "#E9D8A6", "#003049"]),
    ("Flamingo", ["#FF5D8F", "#FF87AB", "#FFA6C1", "#FFC4D6", "#2B2D42", "#FFF0F5"]),
    ("Toucan", ["#111111", "#FF7F11", "#FFD23F", "#3BCEAC", "#EE4266", "#FFFFFF"]),
    ("Kingfisher", ["#00569D", "#0087C1", "#F26B1D", "#F8A65D", "#1E2A36", "#F2F2F2"]),
    ("Parrot", ["#2D6A4F", "#52B788", "#D00000", "#FFBA08", "#1D3557", "#F1FAEE"]),
]
