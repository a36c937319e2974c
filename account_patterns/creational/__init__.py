"""Creational patterns: Abstract Factory, Builder, Factory Method, Prototype and Singleton."""
