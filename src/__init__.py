"""volbright - adjust volume or brightness and show an on-screen bar."""
