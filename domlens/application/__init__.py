# Application Layer
