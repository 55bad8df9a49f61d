"""HTTP service and command-line front ends for the course graph core."""
