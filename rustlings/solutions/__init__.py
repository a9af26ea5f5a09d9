"""Reference solutions to many of the exercises."""